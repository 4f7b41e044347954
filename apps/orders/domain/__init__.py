# Orders domain layer
