# Core package - foundational components
#
# Modules:
# - config: Application settings
# - logging: Structured logging
# - errors: Resource error taxonomy
# - access_log: Per-request access events and their sinks
# - storage: Record store contract and in-memory backend
