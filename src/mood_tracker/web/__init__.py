"""JSON API for Mood Tracker."""
