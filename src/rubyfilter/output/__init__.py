"""Output layer: HTML fragments and Rich/JSON result formatting."""
