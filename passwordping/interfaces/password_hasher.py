"""Abstract password hasher interface."""

from abc import ABC, abstractmethod
from typing import Optional

from passwordping.domain.errors import InvalidSaltError


class PasswordHasher(ABC):
    """Abstract password hasher interface.
    
    Each hasher reproduces one legacy format bit for bit. Subclasses set
    `requires_salt` and implement:
    - hash: Compute the formatted hash from a password and a checked salt
    """
    
    requires_salt: bool = False
    
    def compute(self, password: str, salt: Optional[str] = None) -> str:
        """Check the salt requirement and compute the hash.
        
        Args:
            password: Plaintext password
            salt: Format-specific salt, ignored by unsalted formats
            
        Returns:
            Hash string in the format's own textual envelope
            
        Raises:
            InvalidSaltError: If the format needs a salt and none was given,
                or the salt is malformed
        """
        if self.requires_salt and not salt:
            raise InvalidSaltError(f"{type(self).__name__} requires a salt")
        return self.hash(password, salt)
    
    @abstractmethod
    def hash(self, password: str, salt: Optional[str]) -> str:
        """Compute the hash; `salt` is already known to be present when required.
        
        Raises:
            InvalidSaltError: If the salt is malformed for this format
        """
        pass
