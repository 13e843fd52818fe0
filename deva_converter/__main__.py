"""Package entry point for ``python -m deva_converter``.

Runs the CLI, or the HTTP API when ``--serve`` is the first argument.
"""

import sys

if __name__ == "__main__":
    if sys.argv[1:2] == ["--serve"]:
        from deva_converter.server.app import run_api
        run_api()
    else:
        from deva_converter.cli import main
        main()
