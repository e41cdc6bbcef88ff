"""Application services: helpers shared by resolvers."""
