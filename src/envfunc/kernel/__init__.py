"""Kernel layer - contracts shared with the embedding evaluator."""
