"""Global parameters module for termunify.

This module provides access to the run-wide configuration used by the CLI and
the unification pipeline.
"""
from .config import global_config, UnifyConfig
