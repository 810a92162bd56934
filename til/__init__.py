"""Today I Learned: community fact sharing."""
