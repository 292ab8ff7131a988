"""
Service layer - operations exposed to the transport.
"""
