from .photo import PartyPhoto
from .login_token import LoginToken
from .party import PartyMembership

__all__ = ['PartyPhoto', 'LoginToken', 'PartyMembership']
