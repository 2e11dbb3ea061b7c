"""Export orchestration."""
