"""PredictStore API package."""
