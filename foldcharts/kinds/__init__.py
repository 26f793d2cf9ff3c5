"""Chart adapters. Importing a module registers its kinds."""
