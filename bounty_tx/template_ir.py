"""Transaction intermediate representations (TIR) shipped with the service.

Hex-encoded template bodies generated by the tx3 toolchain. Bounty templates
are deployment specific and supplied through settings.
"""

TRANSFER_IR = (
    "ab6466656573a1694576616c506172616d6a457870656374466565736a7265666572656e"
    "6365738066696e7075747381a3646e616d6566736f75726365657574786f73a169457661"
    "6c506172616da16b457870656374496e7075748266736f75726365a56761646472657373"
    "a1694576616c506172616da16b45787065637456616c7565826673656e64657267416464"
    "726573736a6d696e5f616d6f756e74a16b4576616c4275696c74496ea16341646482a166"
    "41737365747381a366706f6c696379644e6f6e656a61737365745f6e616d65644e6f6e65"
    "66616d6f756e74a1694576616c506172616da16b45787065637456616c75658268717561"
    "6e7469747963496e74a1694576616c506172616d6a457870656374466565736372656664"
    "4e6f6e65646d616e79f46a636f6c6c61746572616cf46872656465656d6572644e6f6e65"
    "676f75747075747382a46761646472657373a1694576616c506172616da16b4578706563"
    "7456616c756582687265636569766572674164647265737365646174756d644e6f6e6566"
    "616d6f756e74a16641737365747381a366706f6c696379644e6f6e656a61737365745f6e"
    "616d65644e6f6e6566616d6f756e74a1694576616c506172616da16b4578706563745661"
    "6c756582687175616e7469747963496e74686f7074696f6e616cf4a46761646472657373"
    "a1694576616c506172616da16b45787065637456616c7565826673656e64657267416464"
    "7265737365646174756d644e6f6e6566616d6f756e74a16b4576616c4275696c74496ea1"
    "6353756282a16b4576616c4275696c74496ea16353756282a16a4576616c436f65726365"
    "a16a496e746f417373657473a1694576616c506172616da16b457870656374496e707574"
    "8266736f75726365a56761646472657373a1694576616c506172616da16b457870656374"
    "56616c7565826673656e64657267416464726573736a6d696e5f616d6f756e74a16b4576"
    "616c4275696c74496ea16341646482a16641737365747381a366706f6c696379644e6f6e"
    "656a61737365745f6e616d65644e6f6e6566616d6f756e74a1694576616c506172616da1"
    "6b45787065637456616c756582687175616e7469747963496e74a1694576616c50617261"
    "6d6a4578706563744665657363726566644e6f6e65646d616e79f46a636f6c6c61746572"
    "616cf4a16641737365747381a366706f6c696379644e6f6e656a61737365745f6e616d65"
    "644e6f6e6566616d6f756e74a1694576616c506172616da16b45787065637456616c7565"
    "82687175616e7469747963496e74a1694576616c506172616d6a45787065637446656573"
    "686f7074696f6e616cf46876616c6964697479f6656d696e747380656275726e73806561"
    "64686f63806a636f6c6c61746572616c80677369676e657273f6686d6574616461746180"
)
