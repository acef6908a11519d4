"""Decision logic and sway IPC access."""
