"""
Service layer abstraction.

Each service encapsulates business logic for a domain: brief
generation, the brand DNA profile and the exemplar library.  Services
raise subclasses of ``CreativeEngineError`` which the API layer turns
into HTTP error responses.
"""
