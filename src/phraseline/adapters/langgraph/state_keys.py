"""Default state key names for LangGraph integration."""

# Standard state keys used by phraseline nodes
INPUT_TEXT = "input_text"
PHRASELINE_CHUNKS = "phraseline_chunks"
PHRASELINE_BOUNDARIES = "phraseline_boundaries"
