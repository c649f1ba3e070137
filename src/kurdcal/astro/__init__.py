"""Equinox computation: ΔT, Meeus spring equinox, longitude resolution and caching."""
