"""Red eléctrica: tipos, lectura CDF y modelado."""
