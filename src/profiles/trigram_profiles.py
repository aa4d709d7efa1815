"""Reference trigram profiles for languages of shared scripts.

Each profile holds the 300 most frequent trigrams of a language, most
frequent first, counted over translated message catalogs with the same
convention the extractor uses: NFC text, lowercase letters of the
language's script, every word padded with one boundary on each side,
window stride 1. In the source strings below "_" stands for the boundary
and "|" separates trigrams. Languages of single-language scripts need no
profile.
"""

from __future__ import annotations

from typing import Mapping

from core.constants import (
    PROFILE_BOUNDARY_MARKER,
    PROFILE_SEPARATOR,
    WORD_BOUNDARY,
)
from profiles.languages import Language

LanguageProfile = tuple[str, ...]

_ENG = (
    "ed_|_in|_re|ion|on_|ng_|ing|_co|tio|le_|_no|ot_|not|or_|_to|_th|er_|to_|"
    "ile|ect|es_|the|_fo|for|_fi|he_|in_|nd_|is_|_un|_se|ent|fil|ter|te_|_of|"
    "ati|ted|ate|of_|nt_|and|cti|it_|_is|_pa|se_|_op|re_|val|_de|_ex|_us|_ca|"
    "ge_|con|_pr|_a_|ali|rea|res|id_|ble|com|_an|al_|use|_di|st_|_st|ess|ame|"
    "ran|_li|me_|_ma|ut_|ist|_be|can|_ar|ry_|rec|th_|ver|abl|_wi|nam|et_|ve_|"
    "ead|lid|ste|ad_|tin|ts_|pec|_on|ch_|ith|cat|_su|wit|ort|sta|de_|out|an_|"
    "_do|ons|ins|at_|_sy|ly_|inv|str|ire|nva|err|nst|ail|loc|ive|ack|all|por|"
    "ns_|era|red|_al|en_|exp|lin|_en|age|_ch|int|led|sio|_gi|ce_|_fa|ld_|pre|"
    "ine|ers|men|mat|omm|tor|_or|be_|ne_|as_|ann|ode|_me|nno|sec|ct_|ope|_wh|"
    "_na|_er|ign|_lo|rro|pti|ror|sin|per|ssi|set|ang|no_|_ad|ind|nte|pro|nge|"
    "_va|reg|nde|git|opt|cte|_si|han|fai|add|rt_|_sp|_ba|sym|dat|ore|pac|rel|"
    "sup|_ou|upp|_tr|def|egi|che|_ha|oca|_mo|ll_|ss_|orm|tru|rin|unk|_wa|tch|"
    "mbo|_sh|thi|ymb|bol|cha|ppo|mod|dir|ol_|end|_fr|gis|emo|ory|ize|cou|rat|"
    "oul|uld|les|ren|chi|mit|are|ck_|ult|_ke|pat|_ne|_ta|om_|uct|_as|ow_|ere|"
    "spe|_mi|ruc|cod|his|_ve|_mu|rom|ser|ref|ont|jec|bra|arg|elo|ite|ase|rma|"
    "equ|ica|par|ue_|_at|_nu|rge|ove|num|wor|ber|_by|low|ifi|rsi|iti|own|eci|"
    "ure|fro|xpe|arc|_ob|cre|whi|ain|tab|ume|rem|put"
)

_FRA = (
    "_de|de_|es_|le_|ion|er_|on_|_le|tio|re_|ur_|_co|ent|_pa|nt_|_in|_la|ne_|"
    "la_|ns_|les|fic|_un|our|eur|_no|te_|_d_|_l_|ich|que|ier|ati|_en|ble|chi|"
    "_po|_re|pas|men|_fi|_dé|as_|est|con|_es|lis|tre|cti|st_|res|des|hie|che|"
    "ect|pou|un_|ue_|ssi|dan|ans|_ré|et_|_li|com|du_|ire|_su|_se|ibl|uti|_à_|"
    "rs_|ant|ge_|_da|_pr|_im|en_|par|ess|_du|pos|onn|ts_|ée_|ons|age|eme|til|"
    "ili|val|mpo|_au|it_|imp|_n_|nte|ign|_ut|_ch|_so|ist|ver|rre|se_|une|ter|"
    "sib|ont|_op|nom|ali|_ne|iqu|ise|oss|ce_|_ma|ers|ten|cha|us_|sio|ec_|omm|"
    "_ex|str|_av|ide|nde|ut_|_mo|ifi|and|lle|ser|me_|_tr|_va|ert|_ou|tte|ar_|"
    "non|ave|err|_pe|ort|ure|aut|_ar|_et|_sy|is_|rée|_éc|_qu|_do|_a_|rti|act|"
    "_er|_ce|_si|sse|ntr|inc|ran|_ve|sec|_fo|_lo|ale|nco|pti|té_|per|man|ive|"
    "ou_|nti|cat|cor|rec|vec|ées|end|opt|pro|ite|déf|reu|ins|sta|ir_|tur|nce|"
    "for|omp|_di|ie_|sup|att|ffi|isa|int|_ca|ode|ica|ouv|ez_|ill|êtr|lid|_êt|"
    "oir|om_|abl|anc|ous|ren|orm|arg|mod|upp|_af|at_|_ta|fin|nst|aff|tif|teu|"
    "ind|her|dre|ssa|ini|au_|orr|mat|air|pre|tie|_at|por|éch|lig|gne|ces|ate|"
    "tro|_ét|és_|mme|pri|ére|rou|pe_|leu|tai|sym|tan|nne|_ap|peu|reg|rma|mbo|"
    "sat|tra|ien|enc|tes|rép|ymb|_pl|bol|ara|aqu|son|al_|egi|rer|ule|uet|inv|"
    "gis|épe|ett|sur|cte|_ac|he_|adr|_cl|tiv|rai|pér"
)

_DEU = (
    "en_|er_|ich|ein|_de|der|sch|cht|ung|den|_be|ht_|te_|ver|_au|_ni|_da|nic|"
    "ie_|nde|che|_un|es_|_di|_ei|in_|ate|die|gen|dat|ben|on_|_ve|ier|ert|_in|"
    "zei|_we|nte|ten|ist|rde|ter|tei|ng_|_an|ine|_vo|rt_|wer|it_|ers|ion|ch_|"
    "ere|eic|_ge|end|_si|nge|_zu|st_|ehl|feh|nen|ren|ent|ste|_er|ige|_ko|aus|"
    "_fe|sse|ei_|tio|hen|_is|ne_|eit|erd|nd_|_fü|chl|mit|le_|sie|für|ür_|men|"
    "auf|ber|ann|bei|_re|und|von|tig|_pa|hle|_wi|ell|et_|nn_|kan|abe|_sc|des|"
    "rei|_ke|ebe|kei|ges|ese|sta|nnt|rte|len|geb|kon|_ze|ern|sen|ler|de_|im_|"
    "ge_|_mi|ang|lle|_st|erz|lti|wen|erw|hre|sel|_se|ame|run|and|ült|gül|rze|"
    "_en|rd_|_ka|_al|ode|üss|her|lte|nam|uf_|ind|wir|chn|for|zu_|ati|em_|_pr|"
    "eru|_op|_na|tze|das|lüs|hlü|_ar|as_|ird|nt_|el_|pti|gab|ege|lis|chr|_ab|"
    "ngü|esc|usg|ls_|eim|_od|um_|ies|eil|opt|nis|tel|rst|ite|war|ach|unt|lic|"
    "_le|vor|ket|ger|se_|one|onn|us_|tzt|rwe|ile|hni|me_|nut|re_|all|utz|lt_|"
    "ass|_co|he_|enn|ur_|ing|_nu|is_|alt|_me|akt|ner|omm|_gi|übe|ort|enu|etz|"
    "fer|_üb|pro|orm|als|be_|zen|tet|ien|art|mat|age|spe|ens|hl_|_bi|hal|efe|"
    "_um|at_|eig|isc|set|ign|its|geg|lge|tie|nst|mme|git|gt_|_ak|rie|_ha|änd|"
    "wei|ess|ekt|mer|ete|anz|_fo|gef|rma|ene|ser|kom|int|_im|tte|fun|zt_|_so|"
    "ngs|uch|lie|rch|nze|wur|_wu|ake|tes|ume|ins|rsc"
)

_SPA = (
    "_de|de_|do_|_no|_se|el_|_co|no_|os_|ón_|ión|es_|_el|_es|_en|_la|se_|ar_|"
    "la_|ent|_re|con|ció|en_|ado|ra_|_in|_pa|or_|_un|te_|to_|est|da_|par|as_|"
    "nte|ro_|al_|fic|ara|ica|tra|aci|ero|ta_|_pu|com|que|ido|des|_fi|str|era|"
    "sta|ada|un_|er_|per|_ca|ion|men|rec|cio|_pr|cci|_di|na_|ede|_lo|_si|lid|"
    "ida|ist|_al|ien|res|on_|ndo|ntr|che|pue|_ar|esp|ued|nto|re_|lo_|_op|and|"
    "los|del|ect|por|rad|nes|ivo|one|her|_a_|esc|ich|cad|_po|arc|io_|ue_|ont|"
    "_qu|ecc|ter|rio|enc|den|car|ali|bre|ble|ene|mit|ten|err|una|vo_|dos|pro|"
    "spe|tro|áli|vál|_ex|dir|omb|mbr|_us|_fa|rch|_ha|nci|_so|ifi|ma_|tos|rma|"
    "nom|ori|_er|chi|_ti|hiv|ina|_va|_y_|sió|sec|ire|reg|pre|tor|cto|ran|le_|"
    "cia|rro|fal|pci|ste|act|ir_|ver|po_|iza|ura|ror|omp|las|cac|ce_|all|it_|"
    "tar|_mo|tad|stá|opc|rar|for|_ma|tiv|liz|tes|ato|olo|_o_|_ta|_su|orm|so_|"
    "_ac|rea|ama|mo_|_ob|_fu|ant|abl|dor|ia_|int|inv|cer|ser|lic|ite|qui|ere|"
    "ona|cid|_pe|nst|ari|_ve|ca_|ins|ea_|_me|egi|mie|val|eci|nta|ctu|ece|nvá|"
    "_lí|tie|les|ndi|ici|bol|in_|arg|nea|nal|ual|cla|tá_|git|eta|usa|ces|emp|"
    "ete|mpo|ne_|pos|mer|sin|nco|rac|rta|_li|end|ema|inc|min|ope|_sa|ave|uet|"
    "ono|nti|erm|alo|_tr|ecu|lec|amb|tip|gis|_cl|scr|ini|ve_|cam|cri|ace|lor|"
    "ros|iva|pec|ers|rmi|noc|cre|lav|tab|_le|_cr|_ra"
)

_POR = (
    "_de|de_|ão_|do_|_co|os_|_pa|da_|ado|ção|ar_|_se|ra_|ro_|_a_|fic|ent|_in|"
    "as_|es_|não|_fi|_nã|em_|par|_re|_o_|com|eir|_es|ara|iro|nte|con|che|te_|"
    "er_|ich|to_|hei|or_|_no|ada|_um|açã|tra|_pr|_po|ta_|_do|sta|_li|ido|ica|"
    "_ca|ter|men|_fo|ont|est|rad|um_|ma_|dos|pos|des|el_|_en|vel|_em|ver|_da|"
    "ist|al_|por|_é_|for|_im|mpo|_ex|ntr|res|que|íve|ome|imp|ou_|esp|me_|iza|"
    "liz|_fa|_di|eci|ess|ida|_ta|_ma|são|ões|nto|cad|_te|oss|ia_|nom|se_|_op|"
    "ir_|man|io_|_e_|ini|esc|efi|fin|pre|sív|err|spe|ssí|_ar|_ve|lid|_ou|_qu|"
    "pro|era|no_|po_|alh|ura|def|_er|om_|and|rma|çõe|ha_|_ao|lin|so_|rro|ina|"
    "_su|tad|_us|ifi|_si|ao_|orm|ser|lo_|per|áli|dad|vál|tes|uma|rec|car|ali|"
    "tem|ndo|ste|_va|fal|ho_|mo_|loc|omp|_mo|_al|inv|is_|tar|ros|ue_|rio|opç|"
    "nvá|sec|ect|til|ria|pri|_b_|_me|ade|dor|cia|inh|tam|int|ces|_as|ode|na_|"
    "str|ama|oca|nha|act|rar|ort|_pe|vo_|tiv|ote|cri|ili|_ne|_sa|ers|nde|ten|"
    "pac|_ac|ion|ve_|pas|usa|das|aco|val|lha|upo|_ap|cçã|alt|ecç|alo|qui|ume|"
    "ere|nho|ema|cot|pec|uti|nta|tip|ual|sem|pod|ivo|lho|nci|mbo|end|olo|_ut|"
    "ito|ame|ass|scr|rim|rta|ca_|enc|ant|_na|ero|cid|_lo|tos|_ti|cal|mpr|bol|"
    "ári|elo|lic|rem|ran|cha|oma|erm|sco|lis|anh|nal|_os|_ch|ora|cif|omo|re_|"
    "cio|arg|roc|zad|hec|tur|rmi|ais|mat|_gr|caç|_le"
)

_ITA = (
    "to_|_di|le_|re_|_co|ion|_no|di_|on_|ne_|_de|zio|ile|one|non|_in|ent|ta_|"
    "_ri|la_|ato|con|il_|del|_il|te_|ti_|nte|_fi|per|pos|sta|ell|_un|are|er_|"
    "mpo|bil|fil|_pe|men|ssi|_im|_es|azi|ica|imp|ess|un_|_è_|_se|ibi|com|el_|"
    "_la|ali|chi|_st|oss|_ne|_pr|lla|est|ett|lo_|_re|_da|sib|_so|_l_|ere|_al|"
    "ore|tat|so_|ll_|che|fic|ome|do_|nti|val|ifi|in_|ati|no_|ver|all|_va|_ch|"
    "me_|ten|ni_|ter|_le|oni|_pa|_su|tto|ro_|ata|ra_|_si|li_|att|sci|nto|err|"
    "na_|it_|io_|ire|seg|tor|_i_|ina|cor|ita|nel|tte|cat|_sc|sio|ono|ura|pre|"
    "tro|_mo|ma_|ost|_er|ese|_op|izz|_tr|ric|da_|rat|_ca|_us|and|ont|rma|ito|"
    "zza|nom|he_|_a_|ggi|_qu|ame|_ma|ve_|ndi|eri|rim|for|car|rro|mod|str|ist|"
    "ca_|se_|ran|po_|_me|lid|za_|pro|agg|tra|acc|ser|int|egu|ror|_gi|_e_|dir|"
    "_ar|tti|_sp|cit|man|ri_|rec|por|hia|una|llo|_ve|usc|ce_|_nu|uto|ndo|_el|"
    "que|enz|tes|liz|usa|_po|ius|rea|ero|opz|ale|ia_|ich|pzi|ste|ei_|iav|sto|"
    "ari|min|ris|ori|res|mer|ind|anc|sa_|gge|ppo|ini|ry_|si_|_vi|_at|_o_|ort|"
    "sse|git|spe|orm|ili|ass|ime|sso|era|riu|ave|_fo|lle|ice|eci|olo|dei|cri|"
    "gui|_cr|ory|dal|ora|pri|ele|pac|ume|lit|spo|mit|rit|dif|odi|ene|gio|cif|"
    "ut_|_ap|gli|rta|rsi|co_|rig|ues|ers|sti|_pu|_lo|vis|ant|cch|scr|mat|ual|"
    "son|ivi|nat|loc|_ag|omp|pec|ido|ect|lic|fin|sol"
)

_NLD = (
    "en_|et_|de_|an_|_ge|_de|sta|ver|_be|and|_va|een|van|_in|nie|est|_op|nde|"
    "_ve|_ni|bes|tan|er_|iet|aar|is_|ken|_he|_is|ing|tie|ie_|oor|ere|_on|nd_|"
    "te_|den|ege|_ee|_vo|gel|het|_te|der|gen|nge|or_|aan|rde|in_|ten|sch|ste|"
    "ren|erd|ord|uit|eld|_al|eer|ng_|voo|ers|rd_|naa|eke|_ma|geb|_me|cht|men|"
    "gev|ven|eve|dig|_to|rui|_wo|ebr|_st|wor|ent|ar_|ls_|el_|lle|_re|_ka|_aa|"
    "bru|kan|uik|_ui|voe|gee|_na|ter|met|es_|_wa|_pa|len|_en|ige|ard|ati|opt|"
    "ach|ond|end|ge_|_co|als|waa|kt_|eli|_bi|tek|ele|ldi|nen|pti|al_|nt_|lij|"
    "_di|st_|oer|_do|erw|at_|_of|of_|kke|ijd|it_|tal|out|am_|_ar|ong|reg|wij|"
    "dt_|le_|fou|all|aam|ont|pak|ens|geg|con|aat|tel|nst|chi|akk|ind|slu|rdt|"
    "op_|pro|bij|ket|map|ree|ges|_da|_pr|ut_|one|ike|ove|_fo|sie|eze|_zi|_ko|"
    "ij_|_om|lee|tte|pen|nte|taa|_le|ijn|ap_|ijk|lin|maa|wer|ig_|zij|ume|ell|"
    "ake|re_|rei|_af|_mo|erk|toe|_ov|jn_|jde|ht_|_mi|gro|ist|_sy|ns_|on_|ies|"
    "_we|esc|ld_|ins|ang|gin|rwi|daa|om_|dat|kop|_gr|ite|ppe|wac|tee|ker|rij|"
    "ert|ngs|oeg|din|eel|tvo|itv|hte|nda|laa|ik_|nta|ton|doo|mis|vol|aal|tro|"
    "tij|nds|_sc|chr|id_|die|cti|ron|_er|ke_|ze_|eid|arg|ukt|evo|che|luk|del|"
    "res|arc|eri|rgu|gum|oep|com|isl|ame|roo|erv|rt_|ett|ief|rst|aak|pel|rsi|"
    "ode|dit|rch|_zo|nvo|mer|rsc|hee|rac|ale|mak|_sl"
)

_POL = (
    "nie|ie_|_ni|_po|ani|na_|_pr|_wy|ia_|_za|wan|nia|_na|eni|_do|owa|sta|lik|"
    "_je|ch_|rze|pli|_pl|ny_|prz|ne_|go_|_mo|ego|ów_|moż|_w_|st_|ści|est|pod|"
    "pis|ych|jes|_ko|any|wie|żna|ożn|ji_|awi|zna|ać_|ku_|ej_|do_|rzy|_od|ost|"
    "raw|uży|_op|cze|ane|_li|cji|czy|dan|_uż|nyc|ien|_bł|cie|_z_|pra|je_|cza|"
    "_si|_st|ier|_us|la_|_pa|ika|kat|ię_|tu_|się|iku|no_|zen|kon|ent|pro|owy|"
    "naz|azw|yć_|_in|nik|ja_|_i_|wa_|owe|_ro|em_|wy_|kie|kow|neg|_re|oda|ik_|"
    "zmi|cja|acj|za_|_zn|ci_|pow|ka_|_se|pcj|opc|czn|bra|_ty|zy_|owi|_ka|dzi|"
    "ale|ami|_ob|tal|ywa|dło|zyt|mia|ym_|su_|era|mie|orz|ucz|ki_|alo|luc|klu|"
    "war|men|_ma|zas|bie|ło_|icz|ole|_zm|yst|ak_|_sk|iet|_kl|aln|_dl|dla|jąc|"
    "ini|ty_|_wi|for|_we|pol|ko_|api|zap|taw|ków|roz|ust|ony|tan|_te|_cz|_ar|"
    "_sy|log|łow|zon|ume|ąd_|błą|łąd|tor|row|ist|jśc|lic|dow|ośc|ić_|two|ano|"
    "orm|_lu|wor|art|ian|ion|ocz|ata|str|lub|ub_|ść_|ez_|rto|rma|aki|_gi|acz|"
    "_sp|zan|le_|kcj|it_|ako|li_|one|ra_|lec|_al|szy|odc|to_|wym|res|git|rak|"
    "isa|ran|nal|ana|fik|wyk|iep|tów|dcz|_wa|wid|gra|ącz|łąc|nak|ość|yfi|ece|"
    "by_|cen|pak|poz|ięc|ers|toś|dni|obi|sek|_br|trz|_ja|błę|łęd|ące|iej|_zo|"
    "wer|_ws|yma|idł|nej|zos|ast|wni|ram|uni|tow|wej|wyp|mi_|zys|_da|_to|jak|"
    "uje|ono|now|ste|ędn|zek|zyć|we_|_ta|eks|zie|ają"
)

_RUS = (
    "_не|ть_|ени|_по|_пр|не_|ие_|ние|пол|ать|_в_|_за|ия_|ый_|_ко|ова|ся_|оль|"
    "мен|ля_|но_|_ра|стр|фай|айл|ет_|_фа|ка_|_дл|_вы|ния|тся|ный|пер|ить|_со|"
    "про|для|_на|ани|раз|ват|етс|пре|ров|го_|нны|вер|на_|льз|ой_|_па|ало|_ис|"
    "уда|дал|_об|_уд|ере|спо|_от|_пе|ов_|ии_|_до|льн|_си|дел|ред|анн|ста|сь_|"
    "ого|ком|ест|ом_|ост|тро|ки_|ые_|ств|ван|ли_|ое_|ает|исп|_ст|нов|_ре|зов|"
    "ла_|_ка|ент|чен|уст|под|_из|сти|лен|ая_|пис|при|_с_|_ин|сим|мет|ых_|ует|"
    "еме|дан|иро|тел|ось|лос|ий_|ель|нач|енн|клю|люч|_им|зна|рам|ист|лов|та_|"
    "нев|ьзо|ект|пар|ера|оши|_и_|_ош|шиб|ите|кат|вол|тор|каз|мож|жен|те_|имв|"
    "_оп|ные|дер|ива|щен|мво|рав|зап|аме|ибк|нен|рем|ерж|пус|аци|ных|тан|анд|"
    "ден|зме|ти_|или|ное|нно|аза|бра|йл_|бка|ран|ара|ен_|_ве|жно|име|ног|рок|"
    "аче|ата|сли|ции|ход|_сл|ате|_то|ок_|_ил|ока|ано|ию_|етр|ржи|воз|_но|зде|"
    "мер|обр|ра_|пра|сто|азд|ная|реж|ожн|ика|ной|мещ|вае|ей_|то_|ьны|олн|орм|"
    "фор|_ар|_ус|_зн|вле|фик|опу|сле|оди|кон|ука|чит|_бы|_ук|еще|кци|тны|ево|"
    "рма|ерн|_кл|_да|йла|рек|_мо|_эт|змо|пос|ьно|озм|тал|одн|вод|_се|ене|нст|"
    "ри_|по_|да_|ыть|ер_|оло|_сп|ле_|тек|оже|аль|тно|ми_|тву|_чт|лог|рег|мя_|"
    "ома|ави|из_|од_|тов|еги|пак|тр_|ада|доп|опе|ко_|гис|это|еде|ифи|ны_|ори|"
    "выв|неп|ман|кет|едо|ото|имо|_ди|иче|льк|тру|ем_"
)

_UKR = (
    "_не|ти_|ння|ня_|_по|_ви|не_|_за|ува|енн|анн|ий_|_пр|пер|ати|но_|ван|ере|"
    "кор|ів_|_ко|_на|ся_|від|_до|_у_|_ро|ори|зна|роз|ля_|ист|на_|_пе|ний|ано|"
    "ого|ста|про|ка_|фай|айл|_фа|вик|го_|рис|чен|ити|ало|для|_дл|ико|ні_|оми|"
    "их_|тан|ено|нач|аче|пом|іст|_си|ват|_ст|_па|_ві|мил|пов|_пі|илк|пис|них|"
    "три|ект|ть_|оре|під|рам|_з_|стр|ки_|вда|при|до_|ани|дал|ми_|рек|ови|каз|"
    "сти|ося|сим|_зн|_ре|лос|діл|дан|_як|пар|вол|_бу|_вд|ред|ає_|им_|опе|_об|"
    "_ма|ком|льн|ент|зді|_вк|озд|имв|мво|_мо|вка|ктн|мож|ії_|нов|_да|ост|сто|"
    "ом_|змі|ног|вер|рес|мет|_ін|лен|зап|лка|жен|_сп|еко|ара|аза|кат|ку_|_ти|"
    "рим|аме|тов|анд|ід_|ова|нек|зан|ути|ову|мен|тьс|ься|ові|наз|роб|азв|вив|"
    "ою_|_та|або|що_|етр|тип|ряд|ок_|_є_|ков|апи|вор|тни|_аб|сув|сту|ри_|тор|"
    "рит|ла_|бут|_що|має|ера|ідо|кон|лів|ден|есу|бо_|час|дом|тво|іль|йл_|ції|"
    "за_|клю|люч|_оп|изн|_ар|ома|ним|ті_|код|фік|_чи|мін|_вс|еві|нев|рів|ман|"
    "зав|_кл|_ря|ва_|ово|та_|міс|ожн|пор|ані|аль|кці|му_|тув|ами|рег|ств|_ча|"
    "лу_|чит|су_|мат|_ді|ра_|_се|дже|ідп|нен|ідн|вув|дов|ядк|єть|ло_|_ка|тру|"
    "гіс|фор|орм|ій_|отр|ої_|иво|вле|йла|_ве|егі|иве|тал|вст|аці|_зм|ифі|рук|"
    "ном|_і_|трі|пра|айт|ран|вий|іка|тр_|поп|ому|ідт|сть|обр|ше_|ато|ну_|_мі|"
    "оро|нем|нст|пос|рма|ерш|але|пот|кри|дтр|рен|виз"
)

_BUL = (
    "на_|_на|не_|_пр|_за|ане|_не|_из|та_|_по|ван|то_|те_|да_|за_|_да|ите|_от|"
    "но_|_се|ия_|ва_|_е_|се_|ата|_ко|пре|ен_|_фа|айл|фай|ени|_съ|ран|про|_мо|"
    "ка_|оже|мен|ред|мож|ни_|ира|_в_|ето|же_|от_|раз|при|под|ден|ция|ият|ава|"
    "ове|_с_|_оп|пра|ние|ани|_ра|ния|ост|_об|_ст|ри_|_ре|ста|ие_|_и_|_им|ли_|"
    "изв|ект|ът_|рав|ат_|име|анд|кат|_до|ежд|пол|пци|опц|ото|зва|ент|ест|дав|"
    "ята|лен|неп|ави|ма_|изп|ход|нат|или|дан|нит|ств|ете|_гр|жда|ори|йл_|тел|"
    "нет|тор|са_|зна|нда|_са|реш|сле|_ин|ти_|сто|лед|ки_|ком|ена|аци|_сл|зве|"
    "зад|дър|вър|вил|аде|рек|гре|_па|ада|ома|_то|_бе|ато|епр|ез_|ве_|_ди|тан|"
    "ят_|веж|лов|ман|ява|ате|де_|ива|ода|пис|нов|_ил|каз|_ар|нос|ешк|ме_|олз|"
    "ват|лзв|_си|йло|сти|_въ|пъл|дир|_ка|ука|лон|ст_|зап|без|мат|_ук|мес|дел|"
    "шка|_кл|спе|аза|оме|ире|чен|ова|ед_|усп|дад|_бъ|орм|ко_|ква|ълн|_къ|рма|"
    "рем|од_|ром|фор|бъд|кто|ъм_|яне|тва|_вр|тов|ист|изт|_но|ено|ърж|към|уме|"
    "во_|ржа|еус|стр|нен|екс|еме|кет|ети|гра|арт|ешн|вер|изх|обе|дат|ла_|зпо|"
    "ене|_вс|рой|рес|нти|_зн|неу|ъде|три|зхо|сва|еде|тно|_пъ|али|лно|бек|ичн|"
    "ако|ема|айт|зпъ|мер|лни|клю|люч|едн|тек|_ак|нот|рия|зда|ел_|ра_|вен|_ве|"
    "ърв|ина|пеш|зат|_сп|нал|_та|_дъ|_ни|зи_|реж|шно|по_|або|съз|ъзд|мо_|ика|"
    "чет|мет|лна|бот|раб|вет|има|рат|нт_|еле|ан_|рен"
)

_RAW_PROFILES: Mapping[Language, str] = {
    Language.ENG: _ENG,
    Language.FRA: _FRA,
    Language.DEU: _DEU,
    Language.SPA: _SPA,
    Language.POR: _POR,
    Language.ITA: _ITA,
    Language.NLD: _NLD,
    Language.POL: _POL,
    Language.RUS: _RUS,
    Language.UKR: _UKR,
    Language.BUL: _BUL,
}


def parse_profile(raw_profile: str) -> LanguageProfile:
    """Parse a source profile string into ordered trigrams.

    Positions are kept as written, so the index of a trigram is its rank.

    Args:
        raw_profile: "|"-separated trigrams with "_" for the word boundary.

    Returns:
        Ordered tuple of trigrams.
    """
    return tuple(
        item.replace(PROFILE_BOUNDARY_MARKER, WORD_BOUNDARY)
        for item in raw_profile.split(PROFILE_SEPARATOR)
    )


LANGUAGE_PROFILES: Mapping[Language, LanguageProfile] = {
    language: parse_profile(raw_profile) for language, raw_profile in _RAW_PROFILES.items()
}
PROFILE_RANKS: Mapping[Language, Mapping[str, int]] = {
    language: {trigram: rank for rank, trigram in enumerate(profile)}
    for language, profile in LANGUAGE_PROFILES.items()
}


def profile_for(language: Language) -> LanguageProfile:
    """Return the reference profile of a language, empty when it has none."""
    return LANGUAGE_PROFILES.get(language, ())
