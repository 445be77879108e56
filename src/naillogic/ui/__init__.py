"""Design Atelier presentation layer.

- models: form state enum, snapshot and user-facing labels
- controller: the request lifecycle state machine
- handlers / components / app: the Gradio interface
"""
