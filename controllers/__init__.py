"""
Controller layer for the lifecycle demo.

Controllers own the screen state machines and navigation; PyQt views under
``ui/`` only render what the controllers emit, and the host under
``services/`` decides when each lifecycle call happens.
"""
