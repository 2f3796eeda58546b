"""Service layer — wraps parsing operations in ServiceResult envelopes."""
