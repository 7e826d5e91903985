PROMOTION_SUBJECT = "[Lohnmonitor] Stufenaufstieg: {{ employee.name }}"

PROMOTION_TEXT = """\
Sehr geehrte Personalabteilung,

für folgenden Mitarbeiter steht ein Stufenaufstieg an:

Name: {{ employee.name }}
Personalnummer: {{ employee.personnel_number }}
Aktuelle Stufe: {{ employee.step }}
Nächste Stufe: {{ employee.step + 1 }}
Aufstiegsdatum: {{ promotion_date.strftime('%d.%m.%Y') }}

Bitte leiten Sie die notwendigen Schritte ein.

Mit freundlichen Grüßen
Ihr Lohnmonitor System"""

PROMOTION_HTML = """\
<!DOCTYPE html>
<html>
<body style="font-family: Arial, sans-serif; line-height: 1.6; color: #333;">
  <div style="max-width: 600px; margin: 0 auto; padding: 20px;">
    <h2 style="background: #0066cc; color: white; padding: 15px; text-align: center;">Stufenaufstieg Benachrichtigung</h2>
    <p>Sehr geehrte Personalabteilung,</p>
    <p>für folgenden Mitarbeiter steht ein Stufenaufstieg an:</p>
    <div style="background: white; padding: 15px; border-left: 4px solid #0066cc;">
      <p><b>Name:</b> {{ employee.name }}</p>
      <p><b>Personalnummer:</b> {{ employee.personnel_number }}</p>
      <p><b>Aktuelle Stufe:</b> {{ employee.step }}</p>
      <p><b>Nächste Stufe:</b> {{ employee.step + 1 }}</p>
      <p><b>Aufstiegsdatum:</b> {{ promotion_date.strftime('%d.%m.%Y') }}</p>
    </div>
    <p>Bitte leiten Sie die notwendigen Schritte ein.</p>
    <p>Mit freundlichen Grüßen<br>Ihr Lohnmonitor System</p>
    <p style="text-align: center; color: #666; font-size: 12px;">Diese E-Mail wurde automatisch generiert.</p>
  </div>
</body>
</html>"""
