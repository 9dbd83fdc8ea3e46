"""PredictStore - Firestore access layer for prediction documents."""
