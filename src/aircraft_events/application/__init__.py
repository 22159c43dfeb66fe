"""Application layer – publishers, publish coordinator, replay job."""
