"""翻訳プロバイダ実装"""
