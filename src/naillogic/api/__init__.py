"""Nail Logic — REST surface for the studio page.

Modules
-------
main
    The ``app`` instance, its routes (page, studio config, generate,
    suggest, health) and the ``naillogic`` uvicorn launcher.
models
    Request and response bodies for the generate and suggest routes.
"""
