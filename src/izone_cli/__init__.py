"""izone_cli provides a CLI utility for the local API of iZone controllers."""
