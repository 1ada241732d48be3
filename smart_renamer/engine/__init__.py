"""Classification, validation, suggestion and aggregation engines."""
