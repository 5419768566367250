"""Core domain types, constants and exceptions for the sleep tracker."""
