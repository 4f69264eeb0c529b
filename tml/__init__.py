"""tml - make a symbolic link, creating parent directories as needed."""
