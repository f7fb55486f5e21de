"""Core modules for AeroTable.

This package contains the sweep pipeline and its collaborators:
- sweep: Mach range generation and table building
- calculator: Aerodynamic calculator interface
- barrowman: Reference extended-Barrowman calculator
- conditions: Flight conditions value object
- vehicle: Rocket configuration model
- registry: Calculator lookup by name
- config: Design file persistence (JSON)
"""
