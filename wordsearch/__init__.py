"""Word search puzzle game: generator, selection tracker and static server."""
