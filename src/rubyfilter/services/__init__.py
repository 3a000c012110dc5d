"""Service layer: operations returning :class:`ServiceResult`.

INVARIANT: services never raise for bad input text; problems come back as
``ok=False`` results or warnings.
"""
