"""Recording extraction layer.

This package decodes per-format seismic recordings into the shared IR.
It loads file content, dispatches units to decoders, and assembles groups.
"""
