"""
翻訳エラーの例外クラス階層

翻訳処理で発生する各種エラーを分類するための例外クラスを定義。
"""


class TranslationError(Exception):
    """翻訳エラーの基底クラス"""

    pass


class TranslationNetworkError(TranslationError):
    """ネットワーク関連エラー（API 失敗、レート制限）"""

    pass


class UnsupportedLanguageError(TranslationError):
    """未サポートの言語コード"""

    def __init__(self, code: str, translator: str = "mdlocale"):
        self.code = code
        self.translator = translator
        super().__init__(f"Unsupported target language: {code}")


class MissingCredentialsError(TranslationError):
    """API キーが指定されておらず、環境変数にも存在しない"""

    def __init__(self, service: str, env_var: str):
        self.service = service
        self.env_var = env_var
        super().__init__(
            f"API key not provided for {service} and {env_var} environment variable not set"
        )
