"""Study aids domain: AI-generated artifacts cached per node."""
