"""Multi-author blog REST backend."""
