"""User-facing validation messages."""

BRIDE_NAME_REQUIRED = "Gelin adı zorunludur"
BRIDE_SURNAME_REQUIRED = "Gelin soyadı zorunludur"
GROOM_NAME_REQUIRED = "Damat adı zorunludur"
GROOM_SURNAME_REQUIRED = "Damat soyadı zorunludur"
HOSTED_NAME_REQUIRED = "Sözleşme sahibi adı soyadı zorunludur"
EVENT_DATE_REQUIRED = "Etkinlik tarihi zorunludur"
TIME_START_REQUIRED = "Başlangıç saati zorunludur"
TIME_FINISH_REQUIRED = "Bitiş saati zorunludur"
PHONE_REQUIRED = "Telefon numarası zorunludur"
PHONE_INVALID = "Geçerli bir telefon numarası giriniz"
EVENT_TYPE_REQUIRED = "Etkinlik tipi zorunludur"
GUESTS_INVALID = "Geçerli bir misafir sayısı giriniz"
