"""Service layer — request payload builders and result types."""
