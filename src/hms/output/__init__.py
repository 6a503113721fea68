"""Output layer — Rich console, table rendering and result formatting."""
