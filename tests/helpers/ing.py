"""Sample ING-DiBa export and the matching configuration used across tests."""

from __future__ import annotations

ING_YAML_CONFIG = """\
csv:
  amount_in: 7
  amount_out: 7
  currency: "EUR"
  date: 0
  date_layout_in: "02.01.2006"
  date_layout_out: "2006-01-02"
  default_account: "Expenses:Unknown"
  description: 4
  fields: 0
  payee: 2
  processing_account: "Assets:Unknown"
  separator: ;
  skip: 10
transactions_rules:
  BLAH:
    set_account: "set_account"
    set_comment: "set_comment"
    match_description: "match_description"
    match_payee: "match_payee"
"""

ING_CSV = """\
Umsatzanzeige;Datei erstellt am: 28.03.2020 10:14
;Letztes Update: aktuell

IBAN;DE91 1000 0000 0123 4567 89
Kontoname;Cash
Bank;ING
Kunde;Joe Money
Zeitraum;01.04.2001 - 31.12.2000
Saldo;616,69;EUR

Sortierung;Datum absteigend

In der CSV-Datei finden Sie alle bereits gebuchten Umsaetze. Die vorgemerkten Umsaetze werden nicht aufgenommen, auch wenn sie in Ihrem Internetbanking angezeigt werden.

Buchung;Valuta;Auftraggeber/Empfaenger;Buchungstext;Verwendungszweck;Saldo;Waehrung;Betrag;Waehrung
26.04.2019;26.04.2019;Acme Corp GmbH;Gehalt/Rente;LOHN / GEHALT 04/19;12.604,42;EUR;3.784,22;EUR
24.04.2019;29.04.2019;VISA RYANAIR;Lastschrift;NR8123456015 DUBLIN IE KAUFUMSATZ 18.04 223655 ARN74463669123456099978837;6.823,05;EUR;-16,00;EUR
24.04.2019;29.04.2019;VISA BLOCK HOUSE 1133;Lastschrift;NR8412345615 BERLIN KAUFUMSATZ 18.04 131250 ARN24463689108123456572752;6.839,05;EUR;-27,00;EUR
23.04.2019;26.04.2019;VISA CAR2GO DEUTSCHLAND GMB;Lastschrift;NR8412345615 LEINFELDEN- KAUFUMSATZ 17.04 211423 ARN74612345608000518071223;1.864,95;EUR;-12,22;EUR
23.04.2019;26.04.2019;VISA REWE MARKT GMBH-ZWNL O;Lastschrift;NR8412345615 BERLIN KAUFUMSATZ 17.04 211902 ARN74830729107123456039442;1.877,17;EUR;-6,58;EUR
"""

RYANAIR_ROW = [
    "24.04.2019",
    "29.04.2019",
    "VISA RYANAIR",
    "Lastschrift",
    "NR8123456015 DUBLIN IE KAUFUMSATZ 18.04 223655 ARN74463669123456099978837",
    "6.823,05",
    "EUR",
    "-16,00",
    "EUR",
]

SALARY_ROW = [
    "26.04.2019",
    "26.04.2019",
    "Acme Corp GmbH",
    "Gehalt/Rente",
    "LOHN / GEHALT 04/19",
    "12.604,42",
    "EUR",
    "3.784,22",
    "EUR",
]
