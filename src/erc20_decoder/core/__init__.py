"""Low-level byte handling shared by the decoders."""
