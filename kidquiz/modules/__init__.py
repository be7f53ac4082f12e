"""Engine modules: analytics, recommendation and quiz orchestration."""
