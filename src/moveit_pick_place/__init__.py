"""Scripted pick-and-place for a MoveIt-controlled arm and gripper."""
