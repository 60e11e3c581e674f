DEFAULT_NAMESPACE = "state"
