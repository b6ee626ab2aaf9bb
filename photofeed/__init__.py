"""photofeed: photo-sharing social network backend."""
