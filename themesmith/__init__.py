"""Author syntax themes once and export them to several editor formats."""
