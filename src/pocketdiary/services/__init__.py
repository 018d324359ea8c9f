"""Service layer: streak engine, editability policy, entry orchestration, auth."""
