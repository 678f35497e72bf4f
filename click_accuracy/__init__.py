"""
Click Accuracy Package
======================

A timed click-accuracy game: targets appear at random positions on the play
area and the player clicks as many as possible before the session ends.

- game_core: headless session controller, statistics, timers and views
- game_config.yaml: tunable parameters (session length, spawn period, display)
"""
