"""scenes — pygame scenes pushed onto the app's scene stack."""
