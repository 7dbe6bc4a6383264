"""Engine loop, scene base and high-score persistence."""
