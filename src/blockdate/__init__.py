"""Date field for block-based visual programming editors."""
