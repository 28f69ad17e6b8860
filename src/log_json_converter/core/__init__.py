"""Line parsing engine and file driver."""
