"""rcman: desktop backend for an rclone remote-control daemon."""
