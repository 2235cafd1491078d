"""HTTP layer - dependencies, templating and routers."""
