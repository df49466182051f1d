"""Rename pipeline."""

from vsrename.pipeline.orchestrator import RenameOrchestrator

__all__ = ["RenameOrchestrator"]
