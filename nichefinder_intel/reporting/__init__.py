"""
nichefinder_intel.reporting: reading inputs and rendering / exporting results.

Modules:
  reader     : Load an /api/opportunities JSON dump into Opportunity models.
  formatters : ASCII / Markdown formatters for Typer CLI commands.
  export     : JSON / CSV writers for derived intelligence.
"""
