"""Input acquisition and output stages of the translation pipeline."""
