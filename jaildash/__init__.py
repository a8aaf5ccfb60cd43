"""
jaildash: read-only status dashboard for FreeNAS/TrueNAS jails.

Responsibilities:
- Poll the management API for jails and installed plugins
- Correlate both lists into one view record per jail
- Serve the current snapshot as an HTML page (Flask)
"""

__version__ = "0.3.0"
