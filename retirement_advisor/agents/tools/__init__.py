"""Strands tools exposing the calculation engine to the advisor agent."""
