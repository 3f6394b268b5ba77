from scenarios.run_data import LoginData, RunData
from scenarios.rules_result import RulesResult, TO_VERIFY
from scenarios.rules.base_rules import BaseRules


# ── Login ─────────────────────────────────────────────────────────────────────

class LoginRules(BaseRules):
    def check(self, run_data: RunData) -> RulesResult:
        login = run_data.login
        expected_error = self.context.expected_login_error
        alerts = self._check_protected(login)

        if expected_error is None:
            if login.logged_in:
                return self.ok(alerts=alerts)
            return self.stop(
                alerts=alerts + [self.alert(
                    'LOGIN_FAILED',
                    f'Logowanie "{login.username}" nieudane: {login.error_message or "brak komunikatu"}',
                )],
                reason='Nieudane logowanie',
                expected=False,
            )

        # Scenariusz negatywny: logowanie MA się nie udać
        if login.logged_in:
            return self.stop(
                alerts=alerts + [self.alert(
                    'LOGIN_SHOULD_FAIL',
                    f'Zalogowano "{login.username}", oczekiwano błędu: {expected_error}',
                )],
                reason='Logowanie powinno się nie udać',
                expected=False,
            )

        if not login.error_message or expected_error not in login.error_message:
            alerts.append(self.alert(
                'LOGIN_ERROR_MESSAGE_MISMATCH',
                f'Komunikat: oczekiwano "{expected_error}", jest "{login.error_message}"',
                alert_type=TO_VERIFY,
            ))
        if login.error_message and login.error_closed is False:
            alerts.append(self.alert(
                'LOGIN_ERROR_NOT_CLOSABLE',
                'Komunikat błędu nie znika po kliknięciu X',
                alert_type=TO_VERIFY,
            ))
        return self.stop(alerts=alerts, reason='Oczekiwany błąd logowania')

    def _check_protected(self, login: LoginData) -> list:
        # Bez sesji każda chroniona strona ląduje na stronie logowania
        login_url = self.context.url('/')
        alerts = []
        for path, url in login.protected_urls.items():
            if url.split('?')[0].split('#')[0].rstrip('/') != login_url.rstrip('/'):
                alerts.append(self.alert(
                    'LOGIN_PROTECTED_PAGE_OPEN',
                    f'{path} dostępne bez logowania (URL: {url})',
                ))
        return alerts
