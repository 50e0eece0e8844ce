"""Helpers for JSON, predicates, iteration, files, call stacks, macros, sampling, secrets, KMS contracts and replayable sessions."""

__version__ = "0.1.0"