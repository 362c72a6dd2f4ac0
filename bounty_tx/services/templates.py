"""Transaction templates and argument derivation.

Each intent kind resolves through one tx3 template. A template declares the
parameters it needs; some come from the caller's intent, the rest from
static platform configuration (script addresses, credentials, reference
UTxOs). Arguments are derived locally and checked before any network call.
"""
from dataclasses import dataclass, field
from typing import Dict, Mapping, Tuple

from trp_adapter.schemas import TirEnvelope

from bounty_tx.config import Settings
from bounty_tx.exceptions import MissingParameterError, ResolutionError
from bounty_tx.schemas.intents import Intent, IntentKind


@dataclass(frozen=True)
class TxTemplate:
    """Static description of one tx3 template."""
    name: str
    params: Tuple[str, ...]
    # template parameter -> Settings attribute
    static_fields: Mapping[str, str] = field(default_factory=dict)
    # Settings attribute holding the hex TIR body
    ir_setting: str = ""
    # Whether the orchestrator evaluates before returning the envelope
    evaluate: bool = False


TEMPLATES: Dict[IntentKind, TxTemplate] = {
    IntentKind.CREATE_BOUNTY: TxTemplate(
        name="create_with_lovelace",
        params=(
            "bounty_creation_fee",
            "bounty_id",
            "bounty_rewards_fee",
            "maintainer",
            "maintainer_payment_key",
            "maintainer_stake_key",
            "min_ada",
            "reward_amount",
            "since",
            "time_limit",
            "until",
            "githoneyaddr",
            "script",
            "admin_payment_key",
            "settings_ref",
            "minting_policy_id",
        ),
        static_fields={
            "githoneyaddr": "githoney_addr",
            "script": "githoney_script_address",
            "admin_payment_key": "admin_payment_cred",
            "settings_ref": "validator_ref",
            "minting_policy_id": "minting_policy_id",
        },
        ir_setting="create_bounty_tir",
        evaluate=True,
    ),
    IntentKind.ADD_FUNDS: TxTemplate(
        name="add",
        params=(
            "amount",
            "bounty_id",
            "sponsor",
            "script",
            "settings_ref",
            "minting_policy_id",
        ),
        static_fields={
            "script": "githoney_script_address",
            "settings_ref": "validator_ref",
            "minting_policy_id": "minting_policy_id",
        },
        ir_setting="add_funds_tir",
        evaluate=True,
    ),
    IntentKind.DEPLOY_SETTINGS: TxTemplate(
        name="deploy",
        params=(
            "creation_fee",
            "reward_fee",
            "script",
            "script_version",
            "settings_minting_policy",
            "settings_minting_version",
            "settings_policy_id",
            "settings_token_name",
            "utxo_ref",
            "githoney_payment_credential",
            "githoney_script",
            "githoney_staking_credential",
            "githoneyaddr",
        ),
        static_fields={
            "githoney_payment_credential": "githoney_payment_cred",
            "githoney_script": "githoney_script_bytes",
            "githoney_staking_credential": "githoney_staking_cred",
            "githoneyaddr": "githoney_addr",
        },
        ir_setting="deploy_settings_tir",
    ),
    IntentKind.TRANSFER: TxTemplate(
        name="transfer",
        params=("quantity", "receiver", "sender"),
        ir_setting="transfer_tir",
    ),
}


class TemplateRegistry:
    """Maps intents to templates, arguments and TIR bodies."""

    def __init__(self, settings: Settings, templates: Mapping[IntentKind, TxTemplate] = TEMPLATES):
        self.settings = settings
        self.templates = templates

    def template_for(self, kind: IntentKind) -> TxTemplate:
        return self.templates[kind]

    def build_args(self, intent: Intent) -> Dict[str, str]:
        """
        Merge caller fields with the template's static fields.

        Static configuration wins on a name clash. Returns exactly the
        declared parameters, in declaration order.

        Raises:
            MissingParameterError: a declared parameter is absent or empty.
        """
        template = self.template_for(intent.kind)

        supplied = intent.model_dump()
        for param, attr in template.static_fields.items():
            supplied[param] = getattr(self.settings, attr)

        missing = [p for p in template.params if supplied.get(p) in (None, "")]
        if missing:
            raise MissingParameterError(template.name, missing)

        return {p: str(supplied[p]) for p in template.params}

    def tir_for(self, kind: IntentKind) -> TirEnvelope:
        """Get the TIR envelope for an intent kind."""
        template = self.template_for(kind)
        content = getattr(self.settings, template.ir_setting, "")
        if not content:
            raise ResolutionError(
                f"No template body configured for '{template.name}'",
                {"setting": template.ir_setting},
            )
        return TirEnvelope(content=content, version=self.settings.tir_version)
