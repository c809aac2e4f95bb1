"""
Pipeline package
"""

from .orchestrator import PipelineOrchestrator

__all__ = ["PipelineOrchestrator"]
