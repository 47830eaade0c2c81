"""HTTP API for the champion trainers."""
