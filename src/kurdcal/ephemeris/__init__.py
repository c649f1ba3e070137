"""Ephemeris adapters (optional).

Thin wrappers around skyfield used to check the series equinoxes against a
JPL ephemeris. Install with:
  pip install "kurdcal[ephemeris]"
"""

def require_ephemeris():
    """Raise a clear error if ephemeris extras aren't installed."""
    try:
        import skyfield  # noqa: F401
    except ImportError as e:
        raise RuntimeError('Ephemeris support requires: pip install "kurdcal[ephemeris]"') from e
