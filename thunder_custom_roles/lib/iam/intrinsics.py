"""
CloudFormation intrinsic functions used inside generated policies. These are resolved at deploy time, which keeps
account, region and partition out of the packaged template.
"""


def ref(name: str) -> dict:
    return {"Ref": name}


def join(delimiter: str, values: list) -> dict:
    return {"Fn::Join": [delimiter, values]}


AWS_ACCOUNT_ID = ref("AWS::AccountId")
AWS_PARTITION = ref("AWS::Partition")
AWS_REGION = ref("AWS::Region")
