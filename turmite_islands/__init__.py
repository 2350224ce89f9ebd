"""Island-model evolution of competing turmite rule tables."""
