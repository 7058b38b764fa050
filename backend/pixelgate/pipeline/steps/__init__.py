"""Review steps, one module per step."""
