"""HTTP adapter: receives arena updates and returns action codes."""
