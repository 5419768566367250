"""Qt user interface: state store, view models, connectors and widgets."""
