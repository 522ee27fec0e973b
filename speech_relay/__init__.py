"""WebSocket relay between audio clients and Google Cloud streaming speech recognition."""
