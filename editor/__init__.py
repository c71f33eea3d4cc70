"""
Wang Tiles - Editor Package

Editor-side algorithms that drive the Wang matching engine.
"""
