"""AeroTable: Mach-sweep aerodynamic coefficient tables for rocket designs."""

__app_name__ = "AeroTable"
__version__ = "0.1.0"
