"""Static-file HTTP server and its supporting components."""