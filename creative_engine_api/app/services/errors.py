"""Exceptions raised by the service layer."""


class CreativeEngineError(Exception):
    """Base class for all service failures."""


class DNAError(CreativeEngineError):
    """The brand DNA file could not be read or written."""


class ExemplarError(CreativeEngineError):
    """The exemplars file could not be read or written."""


class GenerationError(CreativeEngineError):
    """The brief could not be produced by the generative API."""
