"""Intent schemas: one request shape per kind of transaction."""
import enum
from typing import ClassVar, Union

from pydantic import BaseModel


class IntentKind(str, enum.Enum):
    """Kind of transaction a caller asks for."""
    CREATE_BOUNTY = "create_bounty"
    ADD_FUNDS = "add_funds"
    DEPLOY_SETTINGS = "deploy_settings"
    TRANSFER = "transfer"


class _IntentBase(BaseModel):
    kind: ClassVar[IntentKind]

    class Config:
        frozen = True
        extra = "forbid"


class CreateBounty(_IntentBase):
    """Create a bounty locked with lovelace rewards."""
    kind: ClassVar[IntentKind] = IntentKind.CREATE_BOUNTY

    bounty_creation_fee: str
    bounty_id: str
    bounty_rewards_fee: str
    maintainer: str
    maintainer_payment_key: str
    maintainer_stake_key: str
    min_ada: str
    reward_amount: str
    since: str
    time_limit: str
    until: str

    class Config:
        frozen = True
        extra = "forbid"
        json_schema_extra = {
            "example": {
                "bounty_creation_fee": "1000000",
                "bounty_id": "deadbeef001",
                "bounty_rewards_fee": "500000",
                "maintainer": "addr_test1qpp8qndr4p5cjndgufqctlpklk7c9asf9jz6z76lcmjjyyavuam5ced7vsutn86dghwa46yz8cum5hdc42dv7fedaz6sgkx26d",
                "maintainer_payment_key": "42704da3a869894da8e24185fc36fdbd82f6092c85a17b5fc6e52213",
                "maintainer_stake_key": "ace7774c65be6438b99f4d45dddae8823e39ba5db8aa9acf272de8b5",
                "min_ada": "2000000",
                "reward_amount": "10000000",
                "since": "1768502795",
                "time_limit": "100000",
                "until": "1768602795",
            }
        }


class AddFunds(_IntentBase):
    """Add reward funds to an existing bounty."""
    kind: ClassVar[IntentKind] = IntentKind.ADD_FUNDS

    bounty_id: str
    sponsor: str
    amount: str


class DeploySettings(_IntentBase):
    """Publish the platform settings UTxO."""
    kind: ClassVar[IntentKind] = IntentKind.DEPLOY_SETTINGS

    creation_fee: str
    reward_fee: str
    script: str
    script_version: str
    settings_minting_policy: str
    settings_minting_version: str
    settings_policy_id: str
    settings_token_name: str
    utxo_ref: str


class Transfer(_IntentBase):
    """Plain value transfer between two addresses."""
    kind: ClassVar[IntentKind] = IntentKind.TRANSFER

    sender: str
    receiver: str
    quantity: str

    class Config:
        frozen = True
        extra = "forbid"
        json_schema_extra = {
            "example": {
                "sender": "addr_test1vz...sender",
                "receiver": "addr_test1vz...receiver",
                "quantity": "5000000",
            }
        }


Intent = Union[CreateBounty, AddFunds, DeploySettings, Transfer]
