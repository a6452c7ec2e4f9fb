"""Pure metric calculations: trend, strength, nutrition, units."""
