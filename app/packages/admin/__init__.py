"""Admin package - submission review and café maintenance."""
