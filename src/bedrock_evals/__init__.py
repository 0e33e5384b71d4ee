"""Amazon Bedrock評価ジョブ向けのプリフライト検証ツール群。"""
