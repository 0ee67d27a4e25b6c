"""Request building, transport and post-processing for the Gemini API."""
