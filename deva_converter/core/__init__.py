"""Core tokenization, aksarization and table-validation modules.

WHY: The core package holds the stable heart of the converter: the aksara
IR, the validated scheme tables, and the two state machines that build
aksaras. Renderers, the CLI and the HTTP API all sit on top of it.

HOW: ir.py defines the data structures, tables.py validates configuration,
tokenizer.py and aksarizer.py parse input, converter.py ties them together,
analysis.py computes statistics over aksara sequences.

RULES:
- The IR is the contract between parsing and rendering; change with care
- Parsing is script-specific, rendering is renderer-specific; neither
  leaks into the other
"""
