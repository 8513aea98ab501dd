"""Panels, widgets and the screen layout of the monitor, built with rich."""