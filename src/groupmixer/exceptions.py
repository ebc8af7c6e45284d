"""Exceptions for use in Group Mixer"""

# Group Mixer
# Copyright (C) 2025  Group Mixer developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.


# ========== Base Application Exception ==========


class GroupMixerException(Exception):
    """Base exception for all Group Mixer errors.

    All custom exceptions in the application should inherit from this class.
    This enables catching all application-specific errors with a single except clause.
    """

    pass


# ========== Allocation Exceptions ==========


class AllocationException(GroupMixerException):
    """Base exception for group allocation errors."""

    pass


class GroupCountError(AllocationException):
    """Raised when more groups are requested than there are people."""

    def __init__(self, number_of_groups: int, number_of_people: int):
        self.number_of_groups = number_of_groups
        self.number_of_people = number_of_people
        super().__init__(
            f"Number of groups ({number_of_groups}) cannot exceed "
            f"number of people ({number_of_people})"
        )


class NameCountError(AllocationException):
    """Raised when the number of group names differs from the number of groups."""

    def __init__(self, number_of_names: int, number_of_groups: int):
        self.number_of_names = number_of_names
        self.number_of_groups = number_of_groups
        super().__init__(
            f"Number of group names ({number_of_names}) must match "
            f"number of groups ({number_of_groups})"
        )


# ========== Person Exceptions ==========


class PersonException(GroupMixerException):
    """Base exception for person-related errors."""

    pass


class PersonNotFoundException(PersonException):
    """Raised when a requested person cannot be found."""

    pass


class InvalidPersonDataException(PersonException):
    """Raised when person data is invalid or incomplete."""

    pass


# ========== File/Resource Exceptions ==========


class ResourceException(GroupMixerException):
    """Base exception for resource-related errors."""

    pass


class FileLoadException(ResourceException):
    """Raised when a file cannot be loaded."""

    pass


class FileSaveException(ResourceException):
    """Raised when a file cannot be saved."""

    pass


# ========== Configuration Exceptions ==========


class ConfigurationException(GroupMixerException):
    """Base exception for configuration errors."""

    pass


class InvalidConfigurationException(ConfigurationException):
    """Raised when configuration data is invalid."""

    pass
