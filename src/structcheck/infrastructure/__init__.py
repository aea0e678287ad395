"""structcheck infrastructure layer: file formats and language front ends."""
