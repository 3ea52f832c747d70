"""Top-level zarbiter commands (auto-discovered by the dispatcher)."""
