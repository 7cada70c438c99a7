"""Core transcoding modules.

WHY: The core package is the stable heart of the tool: the attribute
dictionary, the payload envelope, the expression scanner, dialect
detection, both transcoders and the optimization bridge. The CLI and the
HTTP API are thin layers over it.

HOW: attributes.py and payload.py are leaf data/codec modules.
scanner.py finds expression ends, detect.py classifies, transcode.py
converts in both directions, bridge.py chains them around an optimizer,
and document.py applies the bridge to every inline SVG in a file.

RULES:
- Everything here is synchronous, pure string in / string out
- No module in core imports from optimizers, cli or server
"""
