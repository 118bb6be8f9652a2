"""sftpmirror - mirror directory trees between SFTP servers and local disks."""

__version__ = "0.1.0"
