"""Plugin hook specifications."""
